"""
Machine Learning modules for PivotKarir.

Submodules:
- nlp: profile loading and text rendering
- embeddings: sentence embeddings and similarity
"""
