"""Game server: map, entities, account storage and HTTP routes."""