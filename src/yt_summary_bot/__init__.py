"""Slack bot that summarizes YouTube videos mentioned to it."""
