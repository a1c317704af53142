"""Code generation for the SPL language: ASTs, SSM instructions, and BOF headers."""

__version__ = "0.1.0"

__all__ = [
    "ast",
    "bof",
    "builders",
    "code",
    "code_seq",
    "code_utils",
    "file_location",
    "gen_code",
    "id_attrs",
    "id_use",
]