import asyncio

from deepseek_bridge import DeepSeekClient, GenerateRequest, GenerationConfig, Message


async def main() -> None:
    client = DeepSeekClient(api_key="DUMMY")

    # Demonstrate registry gating: only deepseek-chat and deepseek-reasoner are known
    req = GenerateRequest(
        messages=[Message(role="user", content="Tell me a joke!")],
        config=GenerationConfig(temperature=0),
    )

    try:
        await client.generate("deepseek-coder", req)
    except Exception as e:
        print("Expected error:", type(e).__name__, e)
    finally:
        await client.aclose()


if __name__ == "__main__":
    asyncio.run(main())
