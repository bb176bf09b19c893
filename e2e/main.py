import asyncio

from .common import close_session, modules


async def main():
    success = True
    tasks = []

    if 'summaries' in modules:
        from .summaries import run as summaries_run

        tasks.append(summaries_run())

    if 'share' in modules:
        from .share import run as share_run

        tasks.append(share_run())

    try:
        success = all(await asyncio.gather(*tasks))
    except Exception:
        success = False
    finally:
        await close_session()

    if not success:
        raise Exception('E2E tests failed')


asyncio.run(main())
