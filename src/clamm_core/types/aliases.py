from hexbytes import HexBytes

type Pubkey = HexBytes
type TickIndex = int
type Timestamp = int  # Unix seconds
