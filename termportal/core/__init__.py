# termportal/core/__init__.py

"""Session core: input decoding, tick scheduling, view control and rendering."""
