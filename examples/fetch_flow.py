"""
Fetch flow example: an async orchestrator producing RemoteData.

This example shows:
1. Walking NotAsked -> Loading -> Success | Failure from outside the type
2. Rendering every state with match
3. Combining two independent fetches with map2
4. Handing a snapshot over the wire with the codec
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field

from pydantic import BaseModel

import remote_data as rd
from remote_data.structured import CodecConfig, PydanticSchema, from_json, to_json

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("fetch_flow")


class User(BaseModel):
    id: int
    name: str


# =============================================================================
# Fake backend (no network)
# =============================================================================
USERS = {1: User(id=1, name="Ada"), 2: User(id=2, name="Grace")}


async def fetch_user(user_id: int) -> User:
    await asyncio.sleep(0.01)
    if user_id not in USERS:
        raise LookupError(f"user {user_id} not found")
    return USERS[user_id]


# =============================================================================
# Orchestrator - owns the state transitions
# =============================================================================
@dataclass
class UserSlot:
    user_id: int
    state: rd.RemoteData[str, User] = field(default_factory=rd.not_asked)

    async def load(self) -> None:
        self.state = rd.loading()
        logger.info("user %s: %s", self.user_id, render(self.state))
        try:
            self.state = rd.success(await fetch_user(self.user_id))
        except LookupError as e:
            self.state = rd.failure(str(e))
        logger.info("user %s: %s", self.user_id, render(self.state))


RENDER = rd.Matcher(
    not_asked=lambda: "Not asked",
    loading=lambda: "Loading...",
    failure=lambda e: f"Failure: {e}",
    success=lambda u: f"Success: {u.name}",
)


def render(state: rd.RemoteData[str, User]) -> str:
    return rd.match(RENDER, state)


async def main() -> None:
    first, second, missing = UserSlot(1), UserSlot(2), UserSlot(99)
    logger.info("user 1: %s", render(first.state))

    await asyncio.gather(first.load(), second.load(), missing.load())

    pair = rd.map2(lambda a, b: f"{a.name} & {b.name}", first.state, second.state)
    print(rd.with_default("nobody", pair))

    broken = rd.map2(lambda a, b: f"{a.name} & {b.name}", first.state, missing.state)
    print(rd.unwrap("lookup failed", str.upper, broken))

    wire = to_json(first.state)
    print(wire)
    restored = from_json(wire, CodecConfig(data_schema=PydanticSchema(User)))
    print(restored == first.state)


if __name__ == "__main__":
    asyncio.run(main())
