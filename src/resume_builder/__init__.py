"""Resume builder: structured resumes in, styled PDFs out."""

__version__ = "0.1.0"
