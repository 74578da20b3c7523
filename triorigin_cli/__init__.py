"""
triorigin CLI - Command-line interface for origin containment.

Usage:
    triorigin count triangles.txt
    triorigin count --config config/batch.yaml --summary
    triorigin classify -- -340 495 -153 -910 835 -947
"""

__version__ = "1.0.0"
