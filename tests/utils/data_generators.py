"""
Test Data Generators
====================

Sample API files and parser outputs used across the test suite.
"""

import json
from pathlib import Path
from typing import Any, Dict, List


SAMPLE_API = """info(
    title: "User API"
    desc: "User management"
    author: "tester"
    email: "test@example.com"
    version: "v1.0.0"
)

type User {
    Id   int64  `json:"id"`
    Name string `json:"name"`
}

type GetUserReq {
    Id int64 `path:"id"`
}

type GetUserResp {
    User User `json:"user"`
}

service user-api {
    @handler GetUser
    get /api/user/:id (GetUserReq) returns (GetUserResp)
}
"""


class ApiOutputGenerator:
    """Builds parser outputs in the shapes the bridge has to handle."""

    @staticmethod
    def default_output() -> Dict[str, Any]:
        """Lower-case keys, one group with one route."""
        return {
            "syntax": {"version": "v1"},
            "info": {
                "title": "User API",
                "desc": "User management",
                "author": "tester",
                "email": "test@example.com",
                "version": "v1.0.0",
            },
            "imports": [{"value": "common.api"}],
            "types": [
                {
                    "name": "User",
                    "fields": [
                        {"name": "Id", "type": "int64", "optional": False},
                        {"name": "Name", "type": "string", "optional": False},
                    ],
                },
            ],
            "service": {
                "name": "user-api",
                "groups": [
                    {
                        "annotation": {"properties": {"prefix": "/api"}},
                        "routes": [
                            {"method": "get", "path": "/api/user/:id", "handler": "GetUser"},
                        ],
                    },
                ],
            },
        }

    @staticmethod
    def go_zero_output() -> Dict[str, Any]:
        """Exported Go field names, as go-zero's spec.ApiSpec marshals them."""
        return {
            "Info": {"Title": "Order API", "Version": "v2", "Properties": {"title": "Order API"}},
            "Syntax": {"Version": "v1"},
            "Imports": None,
            "Types": [{"Name": "Order", "Members": [{"Name": "Id", "Type": {"RawName": "int64"}}]}],
            "Service": {
                "Name": "order-api",
                "Groups": [
                    {
                        "Annotation": {"Properties": {"group": "order"}},
                        "Routes": [
                            {"Method": "post", "Path": "/orders", "Handler": "CreateOrder"},
                            {"Method": "get", "Path": "/orders/:id", "Handler": "GetOrder"},
                        ],
                    },
                    {
                        "Annotation": {"Properties": {"group": "admin"}},
                        "Routes": [
                            {"Method": "delete", "Path": "/orders/:id", "Handler": "DeleteOrder"},
                        ],
                    },
                ],
            },
        }

    @staticmethod
    def minimal_output() -> Dict[str, Any]:
        return {"info": {"title": "T"}, "types": [], "service": {}}

    @staticmethod
    def unicode_output() -> Dict[str, Any]:
        return {"info": {"title": "测试API", "desc": "测试描述"}}


def write_api_file(path: Path, content: str = SAMPLE_API) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def write_json_api_file(path: Path, document: Dict[str, Any]) -> Path:
    """API file for the cat executable: its content is what the parser prints."""
    return write_api_file(path, json.dumps(document, ensure_ascii=False))


def write_failing_api_file(path: Path, message: str = "syntax error near line 1") -> Path:
    """API file that makes the cat executable exit non-zero with ``message``."""
    return write_api_file(path, f"FAIL {message}\n")


def create_multiple_api_files(base_dir: Path, count: int = 3) -> List[Path]:
    files = []
    for index in range(count):
        files.append(
            write_json_api_file(
                Path(base_dir) / f"service_{index}.api",
                {"info": {"title": f"Service {index}"}, "types": [], "service": {}},
            )
        )
    return files
