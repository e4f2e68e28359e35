"""
PivotKarir - semantic matching of a candidate profile against recruiters.

Embeds a candidate profile and two recruiter profiles with a sentence
embedding model and ranks the recruiters by cosine similarity.
"""

__app_name__ = "PivotKarir"
__version__ = "0.1.0"
