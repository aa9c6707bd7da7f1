"""Breakout and pong: paddle/ball/block simulation with a pygame front-end."""
