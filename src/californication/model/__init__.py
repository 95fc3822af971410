"""
The MODEL layer contains pure data structures and persistence.
It has NO knowledge of the window or the widgets.
It deals with Places, Sorting, Preferences and I/O.
"""
