"""dockgen CLI - command line front end for the Dockerfile generator."""

__version__ = "0.1.0"
