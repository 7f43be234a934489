"""
Reference signatures over "hello, world!".
"""

# personal_sign signature (r || s || v, v = 27)
ETHEREUM_MESSAGE = "hello, world!"
ETHEREUM_SIGNATURE = (
    "7c7240d970b40d0b7a7a798584fee5dbc3e64a7fd276eb068c9139e84bda6b57"
    "383276bf73f32ef7055969d0c896884350fc5e899a17904a5f728c5055d8c70d1b"
)
ETHEREUM_ADDRESS = "0x099dC008292EF1FEb96fBF67eA47fB71fde142C3"

# NaCl signed message (signature || message)
SOLANA_MESSAGE = "hello, world!"
SOLANA_SIGNATURE = (
    "v6qvVankHP2h3zEH2P4n1yiW3QnXWWSpVYTGfWUnheYG6bUeTsh1mQj7SUpTn54t2P"
    "UgwD7vhFZ9Tso5yypv9pCDDUJ6UQRkoQS6CfFxt"
)
SOLANA_ADDRESS = "9F5eiDYrZ4X9Eas4ovxaM6LgGhFXc4aRXPUFnuxP2P7U"
