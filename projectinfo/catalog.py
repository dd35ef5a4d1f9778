# projectinfo/catalog.py

"""
Static lookup tables used by tech-stack detection.

- ``CONFIG_FILE_CHECKS``: marker files whose presence at the project root
  signals a technology, checked in order.
- ``DEP_TO_TECH_MAP``: exact manifest dependency name to technology.
- ``ORG_TO_TECH_MAP``: npm organisation scope (the ``org`` in ``@org/pkg``)
  to technology.
"""


from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

CONFIG_FILE_CHECKS: tuple[tuple[str, str], ...] = (
    # languages / type systems
    ("tsconfig.json", "TypeScript"),
    ("jsconfig.json", "JavaScript"),
    # package managers
    ("package-lock.json", "npm"),
    ("yarn.lock", "Yarn"),
    ("pnpm-lock.yaml", "pnpm"),
    ("pnpm-workspace.yaml", "pnpm"),
    ("bun.lockb", "Bun"),
    ("bun.lock", "Bun"),
    ("bunfig.toml", "Bun"),
    ("deno.json", "Deno"),
    ("deno.jsonc", "Deno"),
    ("deno.lock", "Deno"),
    # bundlers and build tools
    ("vite.config.ts", "Vite"),
    ("vite.config.js", "Vite"),
    ("vite.config.mjs", "Vite"),
    ("webpack.config.js", "Webpack"),
    ("webpack.config.ts", "Webpack"),
    ("rollup.config.js", "Rollup"),
    ("rollup.config.mjs", "Rollup"),
    ("esbuild.config.js", "esbuild"),
    ("turbo.json", "Turborepo"),
    ("nx.json", "Nx"),
    ("lerna.json", "Lerna"),
    ("babel.config.js", "Babel"),
    (".babelrc", "Babel"),
    # frameworks
    ("next.config.js", "Next.js"),
    ("next.config.mjs", "Next.js"),
    ("next.config.ts", "Next.js"),
    ("nuxt.config.ts", "Nuxt"),
    ("nuxt.config.js", "Nuxt"),
    ("svelte.config.js", "Svelte"),
    ("astro.config.mjs", "Astro"),
    ("remix.config.js", "Remix"),
    ("angular.json", "Angular"),
    ("vue.config.js", "Vue"),
    ("gatsby-config.js", "Gatsby"),
    ("nest-cli.json", "NestJS"),
    ("electron-builder.json", "Electron"),
    # styling
    ("tailwind.config.js", "Tailwind CSS"),
    ("tailwind.config.ts", "Tailwind CSS"),
    ("postcss.config.js", "PostCSS"),
    ("postcss.config.mjs", "PostCSS"),
    # testing
    ("jest.config.js", "Jest"),
    ("jest.config.ts", "Jest"),
    ("vitest.config.ts", "Vitest"),
    ("vitest.config.js", "Vitest"),
    ("playwright.config.ts", "Playwright"),
    ("playwright.config.js", "Playwright"),
    ("cypress.config.ts", "Cypress"),
    ("cypress.config.js", "Cypress"),
    ("karma.conf.js", "Karma"),
    # linting / formatting
    (".eslintrc.json", "ESLint"),
    (".eslintrc.js", "ESLint"),
    ("eslint.config.js", "ESLint"),
    ("eslint.config.mjs", "ESLint"),
    (".prettierrc", "Prettier"),
    ("prettier.config.js", "Prettier"),
    ("biome.json", "Biome"),
    # infrastructure
    ("Dockerfile", "Docker"),
    ("docker-compose.yml", "Docker"),
    ("docker-compose.yaml", "Docker"),
    ("vercel.json", "Vercel"),
    ("netlify.toml", "Netlify"),
    ("prisma/schema.prisma", "Prisma"),
)

DEP_TO_TECH_MAP: Mapping[str, str] = MappingProxyType(
    {
        # UI frameworks
        "react": "React",
        "react-dom": "React",
        "next": "Next.js",
        "vue": "Vue",
        "nuxt": "Nuxt",
        "svelte": "Svelte",
        "@sveltejs/kit": "SvelteKit",
        "@angular/core": "Angular",
        "solid-js": "SolidJS",
        "preact": "Preact",
        "astro": "Astro",
        "gatsby": "Gatsby",
        "@remix-run/react": "Remix",
        "react-native": "React Native",
        "expo": "Expo",
        "electron": "Electron",
        "jquery": "jQuery",
        # servers
        "express": "Express",
        "fastify": "Fastify",
        "koa": "Koa",
        "hono": "Hono",
        "@nestjs/core": "NestJS",
        "socket.io": "Socket.IO",
        "ws": "WebSocket",
        # state and data fetching
        "redux": "Redux",
        "@reduxjs/toolkit": "Redux",
        "zustand": "Zustand",
        "mobx": "MobX",
        "@tanstack/react-query": "React Query",
        "swr": "SWR",
        "axios": "Axios",
        "graphql": "GraphQL",
        "@apollo/client": "Apollo",
        "@trpc/server": "tRPC",
        "rxjs": "RxJS",
        # data stores and ORMs
        "prisma": "Prisma",
        "@prisma/client": "Prisma",
        "mongoose": "MongoDB",
        "mongodb": "MongoDB",
        "pg": "PostgreSQL",
        "mysql2": "MySQL",
        "mysql": "MySQL",
        "sqlite3": "SQLite",
        "better-sqlite3": "SQLite",
        "redis": "Redis",
        "ioredis": "Redis",
        "typeorm": "TypeORM",
        "sequelize": "Sequelize",
        "drizzle-orm": "Drizzle",
        "knex": "Knex",
        # styling
        "tailwindcss": "Tailwind CSS",
        "styled-components": "styled-components",
        "@emotion/react": "Emotion",
        "sass": "Sass",
        "bootstrap": "Bootstrap",
        "@mui/material": "Material UI",
        "antd": "Ant Design",
        # misc libraries
        "typescript": "TypeScript",
        "zod": "Zod",
        "lodash": "Lodash",
        "three": "Three.js",
        "d3": "D3",
        "chart.js": "Chart.js",
        "firebase": "Firebase",
        "@supabase/supabase-js": "Supabase",
        "stripe": "Stripe",
        "openai": "OpenAI",
        "@anthropic-ai/sdk": "Anthropic",
        "langchain": "LangChain",
        "@modelcontextprotocol/sdk": "MCP",
        "bun-types": "Bun",
    }
)

ORG_TO_TECH_MAP: Mapping[str, str] = MappingProxyType(
    {
        "angular": "Angular",
        "nestjs": "NestJS",
        "vue": "Vue",
        "sveltejs": "Svelte",
        "reduxjs": "Redux",
        "apollo": "Apollo",
        "prisma": "Prisma",
        "aws-sdk": "AWS",
        "google-cloud": "Google Cloud",
        "azure": "Azure",
        "firebase": "Firebase",
        "supabase": "Supabase",
        "tanstack": "TanStack",
        "trpc": "tRPC",
        "mui": "Material UI",
        "chakra-ui": "Chakra UI",
        "radix-ui": "Radix UI",
        "emotion": "Emotion",
        "storybook": "Storybook",
        "testing-library": "Testing Library",
        "remix-run": "Remix",
        "nuxt": "Nuxt",
        "vercel": "Vercel",
        "sentry": "Sentry",
        "tiptap": "Tiptap",
        "nextui-org": "NextUI",
        "headlessui": "Headless UI",
        "fortawesome": "Font Awesome",
        "langchain": "LangChain",
        "modelcontextprotocol": "MCP",
    }
)
