"""
Models, configuration and errors shared by every hollow component
"""
