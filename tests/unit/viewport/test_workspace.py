"""
Unit tests for the WorkspaceView facade.
"""

from unittest.mock import MagicMock

from modmap.core.manifest import LayoutSection, ProjectSettings, ViewportSection
from modmap.viewport.workspace import WorkspaceView


class TestWorkspaceView:

    def test_open_and_draw(self, five_file_project):
        result = WorkspaceView.open(five_file_project)
        assert result.is_ok()
        view = result.unwrap()

        placements = view.draw()
        assert len(placements) == 5
        assert len(view.controller.boxes) == 5
        assert [box.node_id for box in view.controller.boxes] == [p.node_id for p in placements]

    def test_draw_is_repeatable(self, five_file_project):
        view = WorkspaceView.open(five_file_project).unwrap()
        assert view.draw() == view.draw()

    def test_settings_are_applied(self, five_file_project):
        settings = ProjectSettings(
            layout=LayoutSection(width=200, height=100, iterations=3),
            viewport=ViewportSection(max_zoom=2.0),
        )
        view = WorkspaceView.open(five_file_project, settings).unwrap()
        assert view.layout_config.width == 200
        assert view.layout_config.iterations == 3
        assert view.controller.config.max_zoom == 2.0
        for placed in view.draw():
            assert 0 <= placed.position.x <= 200
            assert 0 <= placed.position.y <= 100

    def test_open_not_a_directory(self, tmp_path):
        result = WorkspaceView.open(tmp_path / "missing")
        assert result.is_err()

    def test_events_reach_controller(self, five_file_project):
        opener = MagicMock()
        view = WorkspaceView.open(five_file_project, on_open=opener).unwrap()
        target = view.draw()[0]
        x, y = view.controller.world_to_screen(target.position.x, target.position.y)

        view.on_pointer_move(x, y)
        view.on_click()
        assert view.controller.selected_paths == {target.file.path}

        view.on_double_click()
        opener.assert_called_once_with(target.file.path)

    def test_pan_and_zoom_events(self, five_file_project):
        view = WorkspaceView.open(five_file_project).unwrap()
        view.on_pointer_down(0, 0)
        view.on_pointer_move(30, 40)
        view.on_pointer_up()
        view.on_wheel(0, -100, zoom_modifier=True)
        view.on_pinch(0.5)

        state = view.controller.view
        assert (state.translation_x, state.translation_y) != (0, 0)
        assert state.zoom == 2.5
        assert not state.dragging
