"""
Handoff Module - One-shot data delivery between screens

A screen that opens a file hands the loaded data to the viewer it creates.
Each handoff travels on its own single-use channel keyed by an opaque
session id; the display name of the file plays no part in routing.
"""
import queue
import threading
import uuid
from typing import Any, Dict, List, Optional

from LogViewer.util import get_logger


class HandoffError(Exception):
    """Channel misuse or a receive that timed out"""


def new_session_id() -> str:
    return uuid.uuid4().hex


class HandoffChannel:
    """Registry of single-use channels"""

    def __init__(self):
        self._channels: Dict[str, queue.Queue] = {}
        self._sent: set = set()
        self._lock = threading.Lock()
        self.logger = get_logger('Handoff')

    def _channel(self, session_id: str) -> queue.Queue:
        with self._lock:
            if session_id not in self._channels:
                self._channels[session_id] = queue.Queue(maxsize=1)
            return self._channels[session_id]

    def send(self, session_id: str, payload: Any) -> None:
        """
        Deliver payload to the receiver of session_id

        Raises:
            HandoffError: Something was already sent on this channel
        """
        with self._lock:
            if session_id in self._sent:
                raise HandoffError(f"Data was already sent for session {session_id}")
            self._sent.add(session_id)
            channel = self._channels.setdefault(session_id, queue.Queue(maxsize=1))
        channel.put_nowait(payload)
        self.logger.info(f"Data sent for session {session_id}")

    def receive(self, session_id: str, timeout: Optional[float] = None) -> Any:
        """
        Take the payload of session_id, closing the channel

        The id is forgotten once received or timed out; ids are single use
        because new_session_id never repeats one.

        Args:
            session_id: Channel key
            timeout: Seconds to wait, None waits forever

        Raises:
            HandoffError: Nothing arrived within timeout
        """
        channel = self._channel(session_id)
        try:
            payload = channel.get(timeout=timeout)
        except queue.Empty:
            self.discard(session_id)
            raise HandoffError(f"No data for session {session_id} within {timeout}s")
        self.discard(session_id)
        self.logger.info(f"Data received for session {session_id}")
        return payload

    def discard(self, session_id: str) -> None:
        """Forget session_id and any payload still waiting on it"""
        with self._lock:
            self._channels.pop(session_id, None)
            self._sent.discard(session_id)

    def pending(self) -> List[str]:
        """Session ids with data waiting to be received"""
        with self._lock:
            return [sid for sid, channel in self._channels.items() if not channel.empty()]
