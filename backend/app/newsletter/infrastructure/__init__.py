# Infrastructure - wiring of configured collaborators
