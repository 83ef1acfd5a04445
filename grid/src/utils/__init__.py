"""Shared utilities: logging and error handling"""
