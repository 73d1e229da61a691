"""standup - daily standup report from GitHub pull request activity."""
