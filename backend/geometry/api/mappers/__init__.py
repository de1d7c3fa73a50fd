"""DTO Mappers — pure conversions between wire schemas and domain entities."""
