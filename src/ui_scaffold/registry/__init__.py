"""Registry clients.

Import from submodules:
- abc: RegistryClient, Fetched, FetchFailed, FetchResult
- http: HttpRegistryClient
- fake: FakeRegistryClient
"""
