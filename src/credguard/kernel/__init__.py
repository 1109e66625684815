"""Kernel – error hierarchy shared by every credguard package."""
