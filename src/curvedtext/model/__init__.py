"""
The MODEL layer contains pure data structures and layout logic.
It has NO knowledge of any renderer or UI toolkit.
It deals with Geometry, Arc paths and Legibility.
"""
