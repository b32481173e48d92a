"""
searchkeys command-line interface.
"""
