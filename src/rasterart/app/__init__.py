"""Application-level composition of shapes into procedural images."""
