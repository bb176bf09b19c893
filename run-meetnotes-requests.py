# Description: This script summarizes a folder of transcripts against a running meetnotes instance
# Usage: python run-meetnotes-requests.py -F <transcripts-folder> -o <output-folder> -m <max-requests> -u <meetnotes-url>
# Prerequisites: a folder of .txt transcripts and a running meetnotes instance with GEMINI_API_KEY set

import asyncio
import os
import time
from argparse import ArgumentParser
from pathlib import Path

import aiohttp
from tqdm import tqdm


parser = ArgumentParser()
parser.add_argument('-F', '--folder', dest='folder', help='folder containing transcripts to summarize', required=True)
parser.add_argument('-o', '--output', dest='output', help='output folder, summaries are only printed when missing')
parser.add_argument('-m', '--max', dest='max_requests', help='max requests to make', default=10)
parser.add_argument('-c', '--concurrency', dest='concurrency', help='requests in flight at once', default=4)
parser.add_argument('-p', '--prompt', dest='prompt', help='instruction sent along with every transcript', default=None)
parser.add_argument('-u', '--url', dest='url', help='meetnotes url', default='http://localhost:5000')

args = parser.parse_args()

max_requests = int(args.max_requests)
base_url = args.url
transcripts = sorted(Path(args.folder).rglob('*.txt'))[:max_requests]


async def summarize(session, semaphore, file):
    payload = {'transcript': file.read_text()}

    if args.prompt:
        payload['prompt'] = args.prompt

    async with semaphore:
        start = time.perf_counter()

        async with session.post(f'{base_url}/api/summarize', json=payload) as response:
            try:
                body = await response.json(content_type=None)
            except ValueError:
                body = None

            if not isinstance(body, dict):
                # plain text error pages from the server
                body = {'error': await response.text()}

            return file, response.status, body, time.perf_counter() - start


async def main():
    semaphore = asyncio.Semaphore(int(args.concurrency))
    success = True
    total_duration = 0

    if args.output:
        os.makedirs(args.output, exist_ok=True)

    async with aiohttp.ClientSession() as session:
        tasks = [summarize(session, semaphore, file) for file in transcripts]

        for task in tqdm(asyncio.as_completed(tasks), total=len(tasks), desc='Summarizing'):
            file, status, body, duration = await task
            total_duration += duration

            if status != 200:
                success = False
                print(f'{file.name} failed with status {status}: {body.get("error")}')
                continue

            if args.output:
                with open(f'{args.output}/{file.name}', 'w') as f:
                    f.write(body['summary'])
            else:
                print(f'{file.name} ({duration:.2f}s)\n{body["summary"]}\n')

    print(f'Total duration: {total_duration:.2f}s')

    exit(1 if not success else 0)


asyncio.run(main())
