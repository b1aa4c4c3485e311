"""
QUIRE - Plain-text resume typesetting

Turns an unstructured block of resume text into a paginated, styled PDF by
inferring its structure line by line.

Architecture:
- Intake Context: Text normalization, line classification, and resume/job description splitting
- Layout Context: Stylesheet, block layout, height estimation, and pagination
- Rendering Context: Declarative and procedural PDF backends, output validation
"""

__version__ = "0.1.0"
