"""
Session management for HTTP requests
"""

import requests
from typing import Optional


class SessionManager:
    """Creates the HTTP session shared by every request of a run"""

    def __init__(self, user_agent: Optional[str] = None):
        """
        Initialize session manager

        Args:
            user_agent: Custom User-Agent string, requests' default if None
        """
        self.user_agent = user_agent
        self._session: Optional[requests.Session] = None

    def create_session(self) -> requests.Session:
        """
        Create a new session with configured headers

        Returns:
            Configured requests.Session
        """
        session = requests.Session()

        if self.user_agent:
            session.headers['User-Agent'] = self.user_agent

        return session

    def get_session(self) -> requests.Session:
        """
        Get or create the main session

        Returns:
            The main session
        """
        if self._session is None:
            self._session = self.create_session()
        return self._session

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None
