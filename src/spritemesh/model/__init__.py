"""
The MODEL layer contains pure data structures and geometry helpers.
It has NO knowledge of rendering (PyVista, matplotlib) or physics engines.
It deals with Points, Meshes, Colliders, Parameters and I/O.
"""
