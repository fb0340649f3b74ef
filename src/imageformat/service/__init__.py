"""HTTP service module"""
