"""Domain services: id generation, record building and upload storage."""
