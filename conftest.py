"""Root conftest. Being a rootdir conftest, pytest inserts this directory
into sys.path, so the suite can import panel_coder from a plain checkout."""
