"""A tiny calculator used to demonstrate isotest."""

import asyncio


class Calculator:
    def __init__(self):
        self.memory = 0

    def add(self, a, b):
        return a + b

    def divide(self, a, b):
        return a / b

    def store(self, value):
        self.memory = value

    async def slow_add(self, a, b):
        await asyncio.sleep(0.01)
        return a + b

    @staticmethod
    def parse(text):
        return float(text)
