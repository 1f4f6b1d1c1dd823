from fastapi import Request

from fittrack.storage.base import Storage


# Dependency we will use in FastAPI routes.
# The store is built once by create_app and kept on app.state.
def get_storage(request: Request) -> Storage:
    return request.app.state.storage
