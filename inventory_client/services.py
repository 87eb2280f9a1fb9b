import logging
from typing import Any, Dict, List, Optional

from inventory_client.api_client import ApiClient, ApiError
from inventory_client.session import DropdownData, DropdownItem, UserSession

logger = logging.getLogger(__name__)


class LoginService:
    def __init__(self, api: ApiClient, session: UserSession):
        self.api = api
        self.session = session

    def login(self, username: str, password: str) -> UserSession:
        """Sign in and fill the session; raises ApiError with the server message."""
        body = self.api.post("auth/login", {"username": username, "password": password})
        self.session.token = body["token"]
        self.session.role = body["role"]
        self.session.full_name = body["full_name"]
        logger.info(f"Signed in as {self.session.full_name} ({self.session.role})")
        return self.session

    def logout(self) -> None:
        if self.session.token:
            try:
                self.api.post("auth/logout", None, token=self.session.token)
            except ApiError as e:
                logger.warning(f"Logout failed on the server: {e.message}")
        self.session.clear()


class DropdownsService:
    def __init__(self, api: ApiClient, session: UserSession):
        self.api = api
        self.session = session

    def get_list(self, endpoint: str) -> List[DropdownItem]:
        items = self.api.get(f"dropdown/{endpoint}", token=self.session.token)
        return [DropdownItem(id=item["id"], display_text=item["display_text"]) for item in items]

    def load_all(self) -> DropdownData:
        """Fetch every pick list and store the snapshot on the session."""
        data = DropdownData()
        for endpoint in DropdownData.endpoints():
            setattr(data, endpoint.replace("-", "_"), self.get_list(endpoint))
        self.session.dropdowns = data
        return data


class ResourceClient:
    """Calls of one ``/api/<route>`` resource on behalf of the session user."""

    def __init__(self, api: ApiClient, session: UserSession, route: str):
        self.api = api
        self.session = session
        self.route = route

    def list(self,
             search: Optional[str] = None,
             sort_by: Optional[str] = None,
             sort_order: Optional[str] = None,
             **filters: Any) -> List[Dict[str, Any]]:
        params = {"search": search, "sortBy": sort_by, "sortOrder": sort_order, **filters}
        return self.api.get(self.route, token=self.session.token, params=params)

    def get(self, item_id: int) -> Dict[str, Any]:
        return self.api.get(f"{self.route}/{item_id}", token=self.session.token)

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.api.post(self.route, data, token=self.session.token)

    def update(self, item_id: int, data: Dict[str, Any]) -> None:
        self.api.put(f"{self.route}/{item_id}", dict(data, id=item_id), token=self.session.token)

    def delete(self, item_id: int) -> None:
        self.api.delete(f"{self.route}/{item_id}", token=self.session.token)

    def check_relations(self, item_id: int) -> bool:
        return bool(self.api.get(f"{self.route}/{item_id}/check-relations", token=self.session.token))

    def list_by(self, parent_path: str, parent_id: int) -> List[Dict[str, Any]]:
        return self.api.get(f"{self.route}/{parent_path}/{parent_id}", token=self.session.token)
