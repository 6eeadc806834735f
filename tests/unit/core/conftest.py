"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_MD = """\
---
title: Container
tags: [containers, "", "  ", runtime]
category: fundamental
---

# Container

## What it is

A container is a running process with [limits](./cgroups.md "cgroups").

## Problem it addresses

See [the docs](https://example.com/y).

### Details

Nested heading stays inside the section.
"""

SAMPLE_PLAIN_MD = """\

# Widget

## What It Is
Foo.

## Example
Bar.
"""


@pytest.fixture(name="content_dir")
def content_dir_fixture(tmp_path, monkeypatch):
    """A repo-shaped tree under tmp_path with content/en/ as the working glob root."""
    monkeypatch.chdir(tmp_path)
    en = tmp_path / "content" / "en"
    en.mkdir(parents=True)
    (en / "container.md").write_text(SAMPLE_MD, encoding="utf-8")
    return en
