"""Content discovery, rendering and writing of a static site."""
