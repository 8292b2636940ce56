"""
Topic clustering engine.

Groups embedded content chunks into topic-coherent clusters so quiz and
flashcard generation can sample evenly across a document's topics.
"""

__version__ = "0.1.0"
