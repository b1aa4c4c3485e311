"""
Layout Context

Responsibilities:
- Holds the per-role stylesheet and applies named style presets
- Turns classified lines into layout blocks with estimated heights
- Applies the pagination rule for backends that place content themselves
- Drives any output backend through the Sink interface

Owns: Typography constants, height estimation, page breaking
Never: Classifies text or writes PDF bytes
"""
