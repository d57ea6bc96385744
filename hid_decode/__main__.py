"""python -m hid_decode"""
from .cli import run

run()
