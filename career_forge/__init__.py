"""CareerForge: AI career pathfinder, resume architect and learning hub."""
