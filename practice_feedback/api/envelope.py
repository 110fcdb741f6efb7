"""Response Envelope: {success, data?, error?} wrappers shared by routes and error handlers."""


def ok(data) -> dict:
    return {"success": True, "data": data}


def failure(message: str) -> dict:
    return {"success": False, "error": message}
