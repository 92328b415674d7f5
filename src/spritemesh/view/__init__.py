"""
The VIEW layer adapts built geometry to external consumers:
PyVista (rendering, file export) and matplotlib (quick previews).
"""
