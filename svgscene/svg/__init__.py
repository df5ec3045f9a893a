"""Generic SVG tree, value codecs and markup I/O."""
