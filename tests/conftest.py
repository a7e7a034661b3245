"""Shared fixtures: a throwaway Laravel project with a scripted ``artisan``."""

import json
import sys
from pathlib import Path

import pytest

from routejump.config import JumpSettings, save_settings

ROUTES = [
    {"domain": None, "method": "GET|HEAD", "uri": "/", "action": "Closure"},
    {
        "domain": None,
        "method": "GET|HEAD",
        "uri": "users",
        "action": "App\\Http\\Controllers\\UserController@index",
    },
    {
        "domain": None,
        "method": "POST",
        "uri": "users",
        "action": "App\\Http\\Controllers\\UserController@store",
    },
    {
        "domain": None,
        "method": "GET|HEAD",
        "uri": "users/{user}",
        "action": "App\\Http\\Controllers\\UserController@show",
    },
    {
        "domain": "{account}.localhost",
        "method": "GET|HEAD",
        "uri": "terms/shop-member",
        "action": "App\\Http\\Controllers\\TermsController@shopMember",
    },
    {
        "domain": None,
        "method": "GET|HEAD",
        "uri": "reports/{id}",
        "action": "App\\Http\\Controllers\\ReportController@show",
    },
]

USER_CONTROLLER = """\
<?php

namespace App\\Http\\Controllers;

class UserController extends Controller
{
    public function index()
    {
    }

    public function store(Request $request)
    {
    }

    public function show(User $user)
    {
    }
}
"""

TERMS_CONTROLLER = """\
<?php

namespace App\\Http\\Controllers;

class TermsController extends Controller
{
    public function shopMember()
    {
    }
}
"""


@pytest.fixture
def laravel_project(tmp_path: Path) -> Path:
    """Project whose ``sh artisan route:list --json`` prints ``ROUTES``.

    ``ReportController`` is deliberately missing.
    """
    if sys.platform == "win32":
        pytest.skip("uses /bin/sh scripts")

    (tmp_path / "routes.json").write_text(json.dumps(ROUTES))
    (tmp_path / "artisan").write_text('[ "$1" = "route:list" ] && cat routes.json\n')

    controllers = tmp_path / "app" / "Http" / "Controllers"
    controllers.mkdir(parents=True)
    (controllers / "UserController.php").write_text(USER_CONTROLLER)
    (controllers / "TermsController.php").write_text(TERMS_CONTROLLER)

    save_settings(tmp_path, JumpSettings(command="sh artisan"))
    return tmp_path
