#
# PROJECT: contribution-city
# MODULE: contribution_city/github.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import requests

from .errors import FetchError, InputShapeError
from .records import ContributionCalendar

GRAPHQL_URL = 'https://api.github.com/graphql'
USER_AGENT = 'contribution-city-generator'

CALENDAR_QUERY = """
query($username: String!) {
    user(login: $username) {
        contributionsCollection {
            contributionCalendar {
                totalContributions
                weeks {
                    contributionDays {
                        contributionCount
                        date
                        weekday
                    }
                }
            }
        }
    }
}"""


def fetch_calendar(username: str, token: str, session=None, timeout: float = 30.0) -> ContributionCalendar:
    """
    Fetch the contribution calendar of ``username`` from the GraphQL API.

    ``session`` may be any object with a requests-compatible ``post``.
    Transport failures, non-2xx responses and GraphQL ``errors`` raise
    FetchError; an unexpected payload shape raises InputShapeError.
    """
    http = session if session is not None else requests
    try:
        resp = http.post(
            GRAPHQL_URL,
            json={'query': CALENDAR_QUERY, 'variables': {'username': username}},
            headers={
                'Authorization': f'Bearer {token}',
                'User-Agent': USER_AGENT,
            },
            timeout=timeout
        )
        resp.raise_for_status()
        payload = resp.json()
    except requests.RequestException as e:
        raise FetchError(f"contribution request failed: {e}") from e
    except ValueError as e:
        raise FetchError(f"contribution response is not JSON: {e}") from e

    if not isinstance(payload, dict):
        raise InputShapeError(f"unexpected GraphQL payload: {type(payload).__name__}, not an object")
    if payload.get('errors'):
        messages = '; '.join(str(err.get('message', err)) for err in payload['errors'])
        raise FetchError(f"GraphQL error: {messages}")

    try:
        user = payload['data']['user']
    except (KeyError, TypeError) as e:
        raise InputShapeError(f"unexpected GraphQL payload: missing {e}") from e
    if user is None:
        raise FetchError(f"no such user: {username}")

    try:
        calendar = user['contributionsCollection']['contributionCalendar']
    except (KeyError, TypeError) as e:
        raise InputShapeError(f"unexpected GraphQL payload: missing {e}") from e
    return ContributionCalendar.from_json(calendar)
