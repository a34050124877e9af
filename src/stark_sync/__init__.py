"""Wire-format conversions for the Starknet peer-to-peer sync protocol."""
