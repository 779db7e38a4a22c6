# common/utils/global_functions.py
from typing import Any, Dict, List, Union
from fastapi import Response

def resPayloadData(
    code: int,
    error: bool,
    message: str,
    total_count: int | None = None,
    data: Union[dict, list, str, None] = None,
    notices: List[dict] | None = None,
    res: Response = None
) -> Dict[str, Any]:
    """
    Constructs a standardized response payload.

    Args:
        code (int): The HTTP status code.
        error (bool): Indicates if the response represents an error.
        message (str): A message associated with the response.
        total_count (int | None, optional): The total count of items, if applicable.
        data (Union[dict, list, str, None], optional): The response data.
        notices (List[dict] | None, optional): Transient user-facing notices (toasts).
        res (Response, optional): An optional FastAPI Response object to update its status code.

    If error is True, the provided message will be assigned to errorMessage and the message field will be set to None.
    Conversely, if error is False, message is assigned to the message field and errorMessage is None.
    """
    response_data = {
        "statusCode": code,
        "message": None if error else message or None,
        "errorMessage": message if error else None,
        "totalCount": total_count,
        "data": data,
        "notices": notices or [],
    }

    if res:
        res.status_code = code

    return response_data
