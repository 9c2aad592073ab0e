class NotFoundError(Exception):
    """
    Raised when a keyed lookup, update or delete matches zero rows.

    Rendered by the application as:
        {"error": {"message": "Company apple not found", "status": 404}}
    """

    status = 404

    def __init__(self, entity: str, key):
        self.entity = entity
        self.key = key
        self.message = f"{entity} {key} not found"
        super().__init__(self.message)


def error_body(message: str, status: int) -> dict:
    return {"error": {"message": message, "status": status}}
