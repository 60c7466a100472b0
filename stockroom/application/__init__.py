"""Application layer - DTOs, service wiring and data seeding."""
