"""Menu items and the fixed-price menus built from them."""