"""CIP message encoding for EtherNet/IP: paths, requests, responses and object models."""

__version__ = "1.1.0"