"""
HTTP adapter exposing the simulator to presentation clients.
"""
