"""Supabase (PostgREST + GoTrue) adapters."""

from taskhub.infrastructure.supabase.identity_adapter import SupabaseIdentityAdapter
from taskhub.infrastructure.supabase.record_store import SupabaseRecordStore

__all__ = ["SupabaseIdentityAdapter", "SupabaseRecordStore"]
