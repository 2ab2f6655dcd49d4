"""Gateway, paginator and fetch controller."""

from user_browser.services.gateway import HttpUserGateway, UserGateway, decode_users
from user_browser.services.paginator import paginate, slice_records, total_pages
from user_browser.services.fetch_controller import ControllerSnapshot, FetchController
from user_browser.services.status import status_text

__all__ = [
    "HttpUserGateway",
    "UserGateway",
    "decode_users",
    "paginate",
    "slice_records",
    "total_pages",
    "ControllerSnapshot",
    "FetchController",
    "status_text",
]
