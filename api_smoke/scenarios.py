"""
Scenario configuration for the posts smoke suite
Centralized definition of the fixed request/verification cases
"""

from typing import Dict, List

from .models import HttpMethod, Scenario

POSTS_ENDPOINT = "/posts"
POST_ENDPOINT = "/posts/1"


SCENARIOS: Dict[str, Scenario] = {
    "read": Scenario(
        name="read",
        method=HttpMethod.GET,
        endpoint=POST_ENDPOINT,
        expected_status=(200,),
        description=(
            "Test verifies that the GET /posts/1 endpoint returns 200 status code "
            "and the response body contains the expected post data"
        ),
        body_check_title="Verify response body contains expected fields",
        body_contains=('"userId"', '"id"', '"title"', '"body"'),
    ),

    "create": Scenario(
        name="create",
        method=HttpMethod.POST,
        endpoint=POSTS_ENDPOINT,
        expected_status=(201,),
        description=(
            "Test verifies that the POST /posts endpoint returns 201 status code "
            "and the response body contains the details of the newly created post"
        ),
        body_check_title="Verify response body contains 'id' of the newly created post",
        payload={"title": "foo", "body": "bar", "userId": 1},
        body_contains=('"id":',),
    ),

    "update": Scenario(
        name="update",
        method=HttpMethod.PUT,
        endpoint=POST_ENDPOINT,
        expected_status=(200,),
        description=(
            "Test verifies that the PUT /posts/1 endpoint returns 200 status code "
            "and the response body contains the updated post details"
        ),
        body_check_title="Verify response body contains updated fields",
        payload={"id": 1, "title": "new_foo", "body": "new_bar", "userId": 1},
        body_contains=('"id"', '"title": "new_foo"', '"body": "new_bar"'),
    ),

    "remove": Scenario(
        name="remove",
        method=HttpMethod.DELETE,
        endpoint=POST_ENDPOINT,
        expected_status=(200, 204),
        description=(
            "Test verifies that the DELETE /posts/1 endpoint returns 200 or 204 status code "
            "and the response body is empty or contains '{}'"
        ),
        body_check_title="Verify response body is empty or contains '{}'",
        body_equals_any=("", "{}"),
    ),
}


def get_scenario(name: str) -> Scenario:
    """Get a scenario by name"""
    if name not in SCENARIOS:
        raise ValueError(f"Unknown scenario: {name}")
    return SCENARIOS[name]


def scenario_names() -> List[str]:
    return list(SCENARIOS)
