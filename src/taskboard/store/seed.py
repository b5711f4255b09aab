# src/taskboard/store/seed.py

"""Fixed dataset written once, on the first run against an empty store."""

from __future__ import annotations

from typing import Any, Final

INITIAL_DATA: Final[list[dict[str, Any]]] = [
    {
        "id": 1,
        "title": "Launch Epic Career 🚀",
        "description": "Create a killer Resume",
        "status": "todo",
        "board": "Launch Career",
    },
    {
        "id": 2,
        "title": "Conquer React⚛️",
        "description": "",
        "status": "todo",
        "board": "Launch Career",
    },
    {
        "id": 3,
        "title": "Understand Databases⚙️",
        "description": "",
        "status": "todo",
        "board": "Launch Career",
    },
    {
        "id": 4,
        "title": "Crush Frameworks 🖼️",
        "description": "",
        "status": "todo",
        "board": "Launch Career",
    },
    {
        "id": 5,
        "title": "Master JavaScript 💛",
        "description": "Get comfortable with the fundamentals",
        "status": "doing",
        "board": "Launch Career",
    },
    {
        "id": 6,
        "title": "Never Stop Learning🤖",
        "description": "",
        "status": "doing",
        "board": "Launch Career",
    },
    {
        "id": 7,
        "title": "Explore ES6 Features 🚀",
        "description": "",
        "status": "done",
        "board": "Launch Career",
    },
    {
        "id": 8,
        "title": "Have fun 🥳",
        "description": "",
        "status": "done",
        "board": "Launch Career",
    },
    {
        "id": 9,
        "title": "Plan the quarter 📅",
        "description": "Collect goals from the team",
        "status": "todo",
        "board": "Roadmap",
    },
    {
        "id": 10,
        "title": "Ship the beta 📦",
        "description": "",
        "status": "doing",
        "board": "Roadmap",
    },
    {
        "id": 11,
        "title": "Groceries 🛒",
        "description": "Milk, eggs, bread",
        "status": "todo",
        "board": "Personal",
    },
]
