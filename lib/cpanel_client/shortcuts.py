from __future__ import annotations

from typing import Any

from .errors import DecodeError, TransportError


class CpanelShortcuts:
    """Named helpers for frequent WHM calls, built on the generic dispatcher."""

    def list_accounts(self) -> Any:
        return self.query("listaccts")

    def create_account(self, domain: str, username: str, password: str, plan: str) -> Any:
        return self.query(
            "createacct",
            {
                "domain": domain,
                "username": username,
                "password": password,
                "plan": plan,
            },
        )

    def destroy_account(self, username: str) -> Any:
        return self.query("removeacct", {"username": username})

    def list_databases(self, username: str) -> Any:
        return self.cpanel("MysqlFE", "listdbs", username)

    def list_email_accounts(self, username: str) -> Any:
        return self.cpanel("Email", "listpopswithdisk", username)

    def check_connection(self) -> dict[str, Any]:
        """Call the empty action and report the outcome instead of raising."""
        try:
            self.call("")
        except TransportError as e:
            if e.status_code in (401, 403):
                return {"status": 0, "error": "auth_error", "verbose": "Check username and password/access hash."}
            if e.status_code is not None:
                return {"status": 0, "error": "http_error", "verbose": f"Server responded with {e.status_code}."}
            return {"status": 0, "error": "connection_error", "verbose": f"Could not connect: {e}"}
        except DecodeError as e:
            return {"status": 0, "error": "invalid_response", "verbose": f"Response is not JSON: {e}"}
        return {"status": 1, "error": False, "verbose": "Everything is working."}
