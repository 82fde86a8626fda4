"""Client-side game model: HTTP client, board, shop, start menu and character selection."""