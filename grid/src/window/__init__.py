"""Main window mixins for GridDemoWindow"""
