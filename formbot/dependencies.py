"""
Request-scoped dependencies resolved from the running application.
"""
from fastapi import Request

from formbot.config import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_db(request: Request):
    db = request.app.state.db.sessionlocal()
    try:
        yield db
    finally:
        db.close()
