"""
Application services package.

Contains the file transfer services of the application.
"""

from application.services.github import RemoteFileTransferClient

__all__ = ["RemoteFileTransferClient"]
