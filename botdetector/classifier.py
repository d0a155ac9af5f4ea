"""Bot Detector - Per-request classification engine"""

from types import MappingProxyType
from typing import Dict, Mapping, Set

from .models import ClientState, FlagCategory, ParsedRequest
from .patterns import (
    BAD_USER_AGENT_TOKENS,
    NO_STATIC_MIN_REQUESTS,
    RAPID_FIRE_MAX_REQUESTS,
    RAPID_FIRE_WINDOW,
    STATIC_ASSET_SUFFIXES,
)


def is_bad_user_agent(user_agent: str) -> bool:
    """Empty agents and common scripting clients are treated as bots"""
    if not user_agent:
        return True
    lowered = user_agent.lower()
    return any(token in lowered for token in BAD_USER_AGENT_TOKENS)


def is_static_asset(path: str) -> bool:
    return path.endswith(STATIC_ASSET_SUFFIXES)


class ClassificationEngine:
    """Flags bot-like requests using per-client history.

    Each call to :meth:`classify` updates the state of the requesting client,
    so results depend on every request seen before it for that IP.
    """

    def __init__(self):
        self._clients: Dict[str, ClientState] = {}

    @property
    def clients(self) -> Mapping[str, ClientState]:
        return MappingProxyType(self._clients)

    def state_for(self, ip: str) -> ClientState:
        state = self._clients.get(ip)
        if state is None:
            state = self._clients[ip] = ClientState()
        return state

    def reset(self):
        self._clients.clear()

    def classify(self, request: ParsedRequest) -> Set[FlagCategory]:
        state = self.state_for(request.ip)

        state.record(request.timestamp)
        if is_static_asset(request.path):
            state.static_hits += 1

        flags = set()

        if is_bad_user_agent(request.user_agent):
            flags.add(FlagCategory.BAD_USER_AGENT)

        # The window is pruned before the no-static check, so that check
        # counts requests inside the window rather than lifetime requests.
        state.prune(request.timestamp, RAPID_FIRE_WINDOW)
        rapid_fire = state.window_count > RAPID_FIRE_MAX_REQUESTS

        if state.static_hits == 0 and state.window_count > NO_STATIC_MIN_REQUESTS:
            flags.add(FlagCategory.NO_STATIC_ASSETS)

        if rapid_fire:
            flags.add(FlagCategory.TOO_FREQUENT)

        return flags
