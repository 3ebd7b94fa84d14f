from minilisp.reader.parser import read

__all__ = ["read"]
