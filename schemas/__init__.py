from .poems import Poem, PoemRequest, PoemResponse, SavedPoemsResponse, ErrorResponse

__all__ = ["Poem", "PoemRequest", "PoemResponse", "SavedPoemsResponse", "ErrorResponse"]
