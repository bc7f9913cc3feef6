"""Sample services built on the gateway route scanner"""
