"""Shared pytest fixtures for the test suite."""

import json
from typing import Callable, Dict, List, Optional, Union

import httpx
import pytest

CATEGORY_URL = "https://www.nba.com/news/category/power-rankings"
SCHEDULE_URL = "https://cdn.nba.com/static/json/staticData/scheduleLeagueV2.json"

Route = Union[httpx.Response, Callable[[httpx.Request], httpx.Response]]


def next_data_page(payload) -> str:
    """Minimal Next.js page embedding ``payload`` in __NEXT_DATA__."""
    return (
        "<!DOCTYPE html><html><head><title>NBA</title></head><body>"
        '<div id="__next"></div>'
        '<script id="__NEXT_DATA__" type="application/json">'
        f"{json.dumps(payload)}"
        "</script><script src=\"/_next/app.js\"></script></body></html>"
    )


def category_payload(slugs: List[str]) -> Dict:
    return {
        "props": {
            "pageProps": {
                "category": {"latest": {"items": [{"slug": s} for s in slugs]}}
            }
        },
        "page": "/news/category/[category]",
    }


def article_payload(entries: Optional[List[Dict]]) -> Dict:
    article = {} if entries is None else {"powerRankings": entries}
    return {"props": {"pageProps": {"article": article}}}


def ranking_entry(team_id, rank, name=None, nickname=None, display=None) -> Dict:
    entry = {"teamId": team_id, "currentWeekRank": rank}
    if name is not None:
        entry["teamName"] = name
    if nickname is not None:
        entry["teamNickname"] = nickname
    if display is not None:
        entry["teamDisplayName"] = display
    return entry


def schedule_team(team_id=None, city=None, name=None) -> Dict:
    team = {}
    if team_id is not None:
        team["teamId"] = team_id
    if city is not None:
        team["teamCity"] = city
    if name is not None:
        team["teamName"] = name
    return team


def schedule_game(date_utc, home: Dict, away: Dict) -> Dict:
    game = {"homeTeam": home, "awayTeam": away}
    if date_utc is not None:
        game["gameDateUTC"] = date_utc
    return game


def schedule_payload(*game_dates: List[Dict]) -> Dict:
    return {
        "meta": {"version": 1},
        "leagueSchedule": {
            "seasonYear": "2023-24",
            "gameDates": [{"gameDate": "", "games": list(g)} for g in game_dates],
        },
    }


class FakeNBA:
    """Serves canned responses per URL and records every request."""

    def __init__(self, routes: Optional[Dict[str, Route]] = None):
        self.routes: Dict[str, Route] = dict(routes or {})
        self.requests: List[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(str(request.url))
        if route is None:
            return httpx.Response(404, text="not found")
        if callable(route):
            return route(request)
        return route

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))


@pytest.fixture()
def fake_nba():
    return FakeNBA()


@pytest.fixture()
def client(fake_nba):
    with fake_nba.client() as c:
        yield c
