"""Restaurant orders and their status."""