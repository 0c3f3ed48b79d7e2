def envelope(success: bool, message: str, data=None) -> dict:
    """Uniform response body shared by every category endpoint"""
    return {
        "success": success,
        "message": message,
        "data": data,
    }
