"""
modmap command line interface.
"""
