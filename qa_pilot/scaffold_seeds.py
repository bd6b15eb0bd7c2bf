"""Fixed base files written once into a fresh scaffold."""

from __future__ import annotations

from typing import Dict

from .models import SuiteType

BASE_PAGE_JS = """import { expect } from '@playwright/test';

export class BasePage {
  constructor(page) {
    this.page = page;
  }

  async waitForPageLoad() {
    await this.page.waitForLoadState('networkidle');
  }

  async takeScreenshot(name) {
    await this.page.screenshot({ path: `./screenshots/${name}-${Date.now()}.png` });
  }

  async waitForElement(selector, timeout = 5000) {
    await this.page.waitForSelector(selector, { timeout });
  }
}
"""

UI_TEST_UTILS_JS = """import { expect } from '@playwright/test';

export function generateRandomEmail() {
  return `test${Date.now()}@example.com`;
}

export function generateRandomName() {
  return `TestUser${Date.now()}`;
}

export async function waitForNetworkIdle(page) {
  await page.waitForLoadState('networkidle');
}

export async function assertElementVisible(page, selector) {
  await expect(page.locator(selector)).toBeVisible();
}
"""

BASE_SERVICE_JS = """import { expect } from '@playwright/test';

export class BaseService {
  constructor(request, baseURL) {
    this.request = request;
    this.baseURL = baseURL;
  }

  async makeRequest(method, endpoint, options = {}) {
    const url = `${this.baseURL}${endpoint}`;
    return this.request[method.toLowerCase()](url, options);
  }

  async validateResponse(response, expectedStatus = 200) {
    expect(response.status()).toBe(expectedStatus);
    return response;
  }
}
"""

API_UTILS_JS = """import { expect } from '@playwright/test';

export function generateRandomId() {
  return Math.floor(Math.random() * 1000000);
}

export function buildHeaders(contentType = 'application/json', authToken = null) {
  const headers = { 'Content-Type': contentType };
  if (authToken) {
    headers['Authorization'] = `Bearer ${authToken}`;
  }
  return headers;
}

export async function readJsonBody(response) {
  const data = await response.json();
  expect(data).toBeDefined();
  return data;
}
"""

# Paths are relative to the suite's base folder.
SEED_FILES: Dict[SuiteType, Dict[str, str]] = {
    SuiteType.UI: {
        "pages/BasePage.js": BASE_PAGE_JS,
        "utils/testUtils.js": UI_TEST_UTILS_JS,
    },
    SuiteType.API: {
        "services/BaseService.js": BASE_SERVICE_JS,
        "utils/apiUtils.js": API_UTILS_JS,
    },
}
