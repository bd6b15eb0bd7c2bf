"""Canned provider replies for running the pipeline without a model."""

from __future__ import annotations

import json
import logging
from typing import Dict, List, Optional, Sequence

from .provider import Message

LOGGER = logging.getLogger("mock_llm_client")

MOCK_PLAN = {
    "goal": "Validate login flow with correct and incorrect credentials",
    "testSuites": [
        {
            "name": "Login with valid credentials",
            "type": "UI",
            "steps": [
                "Open login page",
                "Enter correct username/password",
                "Click login",
                "Assert dashboard visible",
            ],
        },
        {
            "name": "API login with valid credentials",
            "type": "API",
            "steps": [
                "Send POST request to /login with valid data",
                "Assert 200 status code",
                "Assert response contains token",
            ],
        },
    ],
}

MOCK_UI_REPLY = """## Page Object
```javascript
// pages/LoginPage.js
import { BasePage } from './BasePage.js';

export class LoginPage extends BasePage {
  async open(baseUrl) {
    await this.page.goto(`${baseUrl}/login`);
  }

  async login(username, password) {
    await this.page.fill('#username', username);
    await this.page.fill('#password', password);
    await this.page.click('#loginBtn');
  }
}
```

## Test Data
```json
{ "name": "login_users", "valid": { "username": "user", "password": "pass" } }
```

## Test Spec
```javascript
// specs/login-ui.spec.js
import { test, expect } from '@playwright/test';
import { LoginPage } from '../pages/LoginPage.js';

test.describe('Login UI', () => {
  test('login with valid credentials shows the dashboard', async ({ page }) => {
    // Arrange
    const loginPage = new LoginPage(page);
    await loginPage.open('http://localhost:3000');

    // Act
    await loginPage.login('user', 'pass');

    // Assert
    await expect(page.locator('text=Welcome')).toBeVisible();
  });
});
```
"""

MOCK_API_REPLY = """## Service Object
```javascript
// services/LoginService.js
import { BaseService } from './BaseService.js';

export class LoginService extends BaseService {
  async login(username, password) {
    return this.makeRequest('POST', '/login', { data: { username, password } });
  }
}
```

## Schema
```json
{ "title": "login_response", "type": "object", "required": ["token"] }
```

## Test Spec
```javascript
// specs/login-api.spec.js
import { test, expect } from '@playwright/test';
import { LoginService } from '../services/LoginService.js';

test.describe('Login API', () => {
  test('POST /login with valid credentials returns 200', async ({ request }) => {
    // Arrange
    const service = new LoginService(request, 'http://localhost:3000');

    // Act
    const response = await service.login('user', 'pass');

    // Assert
    expect(response.status()).toBe(200);
  });
});
```
"""


class MockProvider:
    """Picks a canned reply from the system prompt of the request."""

    def __init__(self, replies: Optional[Dict[str, str]] = None) -> None:
        self.replies = {
            "plan": json.dumps(MOCK_PLAN),
            "ui": MOCK_UI_REPLY,
            "api": MOCK_API_REPLY,
        }
        if replies:
            self.replies.update(replies)
        self.requests: List[Sequence[Message]] = []

    async def complete(self, messages: Sequence[Message]) -> str:
        self.requests.append(list(messages))
        system = next((item["content"] for item in messages if item.get("role") == "system"), "")

        if "test planner" in system:
            LOGGER.info("Returning mock test plan")
            return self.replies["plan"]
        if "API test" in system:
            LOGGER.info("Returning mock API test code")
            return self.replies["api"]
        if "UI test" in system:
            LOGGER.info("Returning mock UI test code")
            return self.replies["ui"]
        LOGGER.info("Unknown prompt type, returning default response")
        return json.dumps({"message": "Mock response for unknown prompt"})
