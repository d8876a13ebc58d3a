"""Contract tests.

The `FileAccess` port is checked once against every adapter (memory and
local) through the parametrized `backend` fixture, so the async file
operations behave the same whichever one is injected.
"""
