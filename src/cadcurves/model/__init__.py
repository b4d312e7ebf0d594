"""
The MODEL layer contains the curve data structures and their closed-form math.
It has NO knowledge of the demo pipeline or of console output.
"""
