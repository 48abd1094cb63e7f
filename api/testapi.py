from fastapi import APIRouter, Query
from fastapi.responses import PlainTextResponse

from api.models import APIError, Pet3

router = APIRouter(prefix="/testapi", tags=["testapi"])

_errors = {
    400: {"model": APIError, "description": "We need ID!!"},
    404: {"model": APIError, "description": "Can not find ID"},
}


@router.get(
    "/get-string-by-int/{some_id}",
    response_model=Pet3,
    summary="Add a new pet to the store",
    responses=_errors,
)
def get_string_by_int(some_id: int):
    """
    get string by ID
    """
    return Pet3(id=some_id)


@router.get(
    "/get-struct-array-by-string/{some_id}",
    response_class=PlainTextResponse,
    responses=_errors,
)
def get_struct_array_by_string(
    some_id: int,
    offset: int = Query(..., description="Offset"),
    limit: int = Query(..., description="Limit"),
):
    """
    get struct array by ID
    """
    return f"OK: GetStructArrayByString:  {some_id}"
