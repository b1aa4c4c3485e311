"""
Rendering Context

Responsibilities:
- Draws layout blocks to PDF through a Sink backend (declarative or procedural)
- Manages output files and directory structure
- Validates rendered documents against their layout blocks
- Wraps drawing failures in DocumentGenerationError

Owns: PDF generation, output management
Never: Classifies lines or decides typography
"""
