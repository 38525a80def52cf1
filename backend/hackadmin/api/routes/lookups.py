from fastapi import APIRouter, HTTPException, status

from hackadmin.core.response import build_success
from hackadmin.utils.lookups import LOOKUPS, STATUSES, get_lookup
from hackadmin.utils.status_colors import DEFAULT_STATUS_COLOR, STATUS_COLORS

router = APIRouter()


@router.get("")
def list_lookups():
    return build_success("Available lookups", sorted(LOOKUPS))


@router.get("/statuses")
def list_statuses():
    return build_success("Application statuses", {
        "statuses": STATUSES,
        "colors": STATUS_COLORS,
        "defaultColor": DEFAULT_STATUS_COLOR,
    })


@router.get("/{name}")
def lookup_options(name: str, lang: str = "en"):
    options = get_lookup(name, lang)
    if options is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown lookup: {name}")
    return build_success(f"{name} options", options)
