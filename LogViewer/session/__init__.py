from .handoff import HandoffChannel, HandoffError, new_session_id

__all__ = ['HandoffChannel', 'HandoffError', 'new_session_id']
