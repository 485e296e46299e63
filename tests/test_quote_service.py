"""
Tests for the motivation quote service.
"""
import pytest

from fitplan.models.profile import validate_profile
from fitplan.services.quote_service import FALLBACK_QUOTE, generate_motivation_quote


@pytest.mark.asyncio
async def test_returns_model_quote(executor, mock_client, completion, sample_profile):
    mock_client.chat.completions.create.return_value = completion('  "Small steps, big changes."\n')

    quote = await generate_motivation_quote(executor, validate_profile(sample_profile))

    assert quote == "Small steps, big changes."


@pytest.mark.asyncio
async def test_rate_limit_exhaustion_uses_fallback(executor, mock_client, status_error, sample_profile):
    mock_client.chat.completions.create.side_effect = status_error(429)

    quote = await generate_motivation_quote(executor, validate_profile(sample_profile))

    assert quote == FALLBACK_QUOTE
    assert mock_client.chat.completions.create.await_count == 3


@pytest.mark.asyncio
async def test_payment_required_uses_fallback(executor, mock_client, status_error, sample_profile):
    mock_client.chat.completions.create.side_effect = status_error(402)

    quote = await generate_motivation_quote(executor, validate_profile(sample_profile))

    assert quote == FALLBACK_QUOTE
    assert mock_client.chat.completions.create.await_count == 1


@pytest.mark.asyncio
async def test_empty_quote_uses_fallback(executor, mock_client, completion, sample_profile):
    mock_client.chat.completions.create.return_value = completion(None)

    assert await generate_motivation_quote(executor, validate_profile(sample_profile)) == FALLBACK_QUOTE
