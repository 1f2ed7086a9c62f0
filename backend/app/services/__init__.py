"""Services: operational tasks that run outside the request cycle (seeding)."""
