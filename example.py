import asyncio

from currapi import ClientConfig, CurrAPIClient, InMemoryRateCache, __version__

print(__version__)  # 0.1.0


async def main() -> None:
    # Reads CURRAPI_API_KEY / CURRAPI_VERBOSE_MODE from the environment
    async with CurrAPIClient(cache=InMemoryRateCache()) as client:
        # Rate for a specific day
        rate = await client.get_rate("EUR", "USD", "2024-01-01")
        print(rate)
        # => 1.1

        # Served from the cache, no second request
        print(await client.convert(100, "EUR", "USD", "2024-01-01"))
        # => 110.00000000000001

        # Today's rate (UTC calendar day)
        print(await client.get_rate("GBP", "INR"))

    # Explicit configuration instead of environment variables
    config = ClientConfig(api_key="your-api-key", verbose_mode=True)
    async with CurrAPIClient(config) as client:
        print(await client.list_currencies())


asyncio.run(main())
