"""Receipt Points: score receipts against the reward rules."""
