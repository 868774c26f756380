"""
Core module - chart data types, configuration, projection math and view state.
"""
