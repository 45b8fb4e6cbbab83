"""Literal contents of the configuration files written into the project."""

TAILWIND_CONFIG_PATH = "tailwind.config.js"
TAILWIND_CONFIG = """/** @type {import('tailwindcss').Config} */
module.exports = {
  content: [
    './index.html',
    './src/**/*.{js,ts,jsx,tsx}',
  ],
  theme: {
    extend: {},
  },
  plugins: [],
};
"""

STYLESHEET_PATH = "src/index.css"
STYLESHEET = """@tailwind base;
@tailwind components;
@tailwind utilities;
"""

GITIGNORE_PATH = ".gitignore"
GITIGNORE = """node_modules
dist
.env
"""

PRETTIER_CONFIG_PATH = ".prettierrc"
PRETTIER_CONFIG = """{
  "semi": false,
  "singleQuote": true
}
"""

MANIFEST_PATH = "package.json"
LINT_STAGED_KEY = "lint-staged"
LINT_STAGED_CONFIG = {
    "*.{js,jsx,ts,tsx}": "eslint --fix",
}

JEST_CONFIG_PATH = "jest.config.json"
JEST_CONFIG = """{
  "testEnvironment": "jsdom"
}
"""

DOTENV_PATH = ".env"
DOTENV = """NODE_ENV=development
API_URL=http://localhost:3000
"""
