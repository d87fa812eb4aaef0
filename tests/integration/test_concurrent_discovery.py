import asyncio

import httpx
import pytest


@pytest.mark.asyncio
async def test_concurrent_queries_are_independent(app):
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url='http://test') as ac:
            params = [
                {'latitude': 40.7128, 'longitude': -74.0060, 'radius': r, 'limit': 50}
                for r in (0.2, 1, 5, 0.2, 1, 5)
            ]
            responses = await asyncio.gather(*(ac.get('/api/v1/discover', params=p) for p in params))

    totals = [r.json()['total'] for r in responses]
    assert all(r.status_code == 200 for r in responses)
    assert totals[:3] == totals[3:]
    assert totals[0] == 3
    assert totals[2] == 10
