"""
WebSocket Package

Socket.IO keyboard input handlers.
"""
