"""
Intake Context

Responsibilities:
- Normalizes raw resume text into indexed lines
- Classifies each line into a semantic role (name, contact, section header, bullet, ...)
- Separates resume content from an appended job description

Owns: Line normalization, classification heuristics, content splitting
Never: Measures, styles, or draws anything
"""
